"""App — contratos e constantes compartilhados pelos builders.

Subpastas:
- constants/: tipos de botão, prefixos de id e defaults
- protocols/: formatos dos registros de saída (Button, ListData, Message)
"""
