"""API: camada de borda HTTP.

Responsabilidades:
- Validar o payload do chat (pydantic)
- Propagar o correlation_id
- Traduzir o DocumentChatOutcome em status HTTP e corpo JSON

Subpastas:
- routes/: endpoints HTTP (chat, health)

NÃO PODE conter: regras do chat, montagem de prompt, IO com o provedor.
"""
