"""Core del cliente: dominio, contratos, configuración y servicios."""
