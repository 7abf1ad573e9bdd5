"""
Boundary layer: adapters for the external persistence systems.
"""
