"""Exceções compartilhadas do conector MailChimp."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Configuração ausente ou mal-formada detectada na inicialização."""


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""
