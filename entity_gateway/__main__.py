"""Run the gateway: python -m entity_gateway"""

from entity_gateway.api.main import run

if __name__ == "__main__":
    run()
