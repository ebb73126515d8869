"""Payload builders — construção de payloads para APIs externas.

Estrutura:
- mailchimp/: membros de lista (subscribe/unsubscribe)
"""

__all__: list[str] = []
