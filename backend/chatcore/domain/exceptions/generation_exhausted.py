"""
GenerationExhaustedError - An IdentifierGenerator ran out of ids.

Fatal for the generator instance; ids never wrap around.
"""


class GenerationExhaustedError(Exception):
    """Raised when the next numeric id would reach the generator's upper bound."""

    def __init__(self, high: int):
        super().__init__(f"Identifier range exhausted (upper bound {high})")
        self.high = high
