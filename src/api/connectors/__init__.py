"""Connectors — adapters de borda para APIs externas.

Estrutura:
- mailchimp/: MailChimp Marketing API v3 (membros de lista)
"""

__all__: list[str] = []
