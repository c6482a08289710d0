"""App: composition root, observabilidade e adapters de IO.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- infra/: implementações concretas de IO (cliente OpenAI)
- observability/: logs estruturados, correlation_id, métricas

Padrão: app executa; api adapta; ai decide; utils apoia.
"""
