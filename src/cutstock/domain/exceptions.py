"""Domain exceptions."""


class InvalidPieceDimensions(ValueError):
    """Raised when a piece cannot fit on a sheet in any allowed orientation.

    Attributes:
        piece_length: Declared length of the offending piece.
        piece_width: Declared width of the offending piece.
        sheet_length: Sheet length the piece was checked against.
        sheet_width: Sheet width the piece was checked against.
    """

    def __init__(
        self,
        piece_length: int,
        piece_width: int,
        sheet_length: int,
        sheet_width: int,
    ) -> None:
        self.piece_length = piece_length
        self.piece_width = piece_width
        self.sheet_length = sheet_length
        self.sheet_width = sheet_width
        super().__init__(
            f"Piece {piece_length}x{piece_width} is larger than the sheet "
            f"dimensions {sheet_length}x{sheet_width}."
        )
