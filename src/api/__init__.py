"""API — camada de borda com o MailChimp.

Subpastas:
- connectors/: cliente HTTP e operações por serviço externo
- payload_builders/: construção de payloads para APIs externas
- validators/: validação de entradas antes de qualquer IO
"""
