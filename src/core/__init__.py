"""
Core Domain Layer.

Modelo de domínio puro do cadastro de clientes:
- shared: exceções e classes base (Entity, ValueObject)
- clientes: Cliente e Endereco

Não depende de framework, banco de dados ou rede.
"""
