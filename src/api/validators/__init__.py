"""Validators — validação de entradas antes de chamadas externas.

Estrutura:
- mailchimp/: email, IP e identificador de membro
"""

__all__: list[str] = []
