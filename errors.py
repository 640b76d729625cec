class UnitError(Exception):
    """Base de todos os erros levantados por uma Unit."""


class InvalidConfig(UnitError, ValueError):
    pass


class ShapeMismatch(UnitError, ValueError):
    pass


class StaleState(UnitError, RuntimeError):
    """Atualização pedida antes de qualquer compute()."""
