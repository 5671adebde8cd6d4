from textual.message import Message

class Navigate(Message):
    """Request navigation to a path inside the site."""
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__()
