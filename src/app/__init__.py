"""App: quadro de issues: agrupamento, inicialização e CLI.

Subpastas:
- bootstrap/: composition root (logging, settings, montagem do quadro)
- services/: agrupamento e renderização do quadro
- observability/: correlation_id das execuções

Padrão: app executa; workflow ordena; config carrega; utils apoia.
"""
