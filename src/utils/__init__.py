"""Utils: helpers puros compartilhados (casing, merge, erros)."""
