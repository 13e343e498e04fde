class ModelPreference:
    """Remembers which model last answered successfully.

    One instance is shared by every request the invoker serves. Updates are
    best-effort: concurrent requests may overwrite each other, which only
    changes the model tried first next time.
    """

    def __init__(self, model: str | None = None) -> None:
        self._model = model

    def get(self) -> str | None:
        return self._model

    def record(self, model: str) -> None:
        self._model = model

    def reset(self) -> None:
        self._model = None
