"""Configuração: settings por domínio e logging estruturado."""
