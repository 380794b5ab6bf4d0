from .config import PLAYER_SYMBOLS, DEFAULT_NAME_PREFIX


class Player:
    """
    one side of the game: a fixed mark and a display name
    """
    def __init__(self, symbol, name=None):
        if symbol not in PLAYER_SYMBOLS:
            raise ValueError(f"unknown player symbol: {symbol!r}")
        self._symbol = symbol
        self._name = self.default_name
        if name is not None:
            self.set_name(name)

    @property
    def symbol(self):
        return self._symbol

    @property
    def name(self):
        return self._name

    @property
    def default_name(self):
        return DEFAULT_NAME_PREFIX + self._symbol

    def get_name(self):
        return self._name

    def set_name(self, new_name):
        """
        store trimmed name, blank falls back to the default label
        """
        # uniqueness is checked by the names dialog, not here
        self._name = new_name.strip() or self.default_name

    def __repr__(self):
        return f"Player({self._symbol!r}, {self._name!r})"
