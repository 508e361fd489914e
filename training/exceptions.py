class IndexOutOfRange(IndexError):
    """Позиция не соответствует ни одному текущему элементу списка"""

    def __init__(self, position: int, size: int):
        self.position = position
        self.size = size
        super().__init__(f"position {position} is out of range for {size} item(s)")
