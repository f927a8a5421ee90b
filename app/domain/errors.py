# app/domain/errors.py


class StartupFailure(RuntimeError):
    """Storage could not be reached while the service was starting."""
