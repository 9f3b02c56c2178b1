"""Servicios del Core: las etapas de la pipeline y su orquestación."""
