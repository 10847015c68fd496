"""
models.py

The shared objects used in the huffcodec.

"""


from typing import Dict, Iterator, List, Tuple, Union

class Symbol:
    """
    Represents a single character of the input text. Read only.
    """
    __slots__ = ("_data",)

    def __init__(self, data: str) -> None:
        if not isinstance(data, str):
            raise ValueError("Data must be of type str")
        if len(data) != 1:
            raise ValueError("Data must be exactly one character")
        self._data: str = data

    @property
    def data(self) -> str:
        return self._data

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Symbol):
            return self.data == other.data
        return False

    def __str__(self) -> str:
        return self.data

    def __repr__(self) -> str:
        return repr(self.data)

    def __hash__(self) -> int:
        return hash(self.data)


class SymbolFrequency:
    """
    Represents a symbol together with its frequency.
    """
    def __init__(self, symbol: Symbol, frequency: int) -> None:
        if not isinstance(symbol, Symbol):
            raise ValueError("Symbol must be of type Symbol")
        if not isinstance(frequency, int) or frequency < 1:
            raise ValueError("Frequency must be an int greater than 0")
        self.symbol: Symbol = symbol
        self.frequency: int = frequency

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SymbolFrequency):
            return self.symbol == other.symbol and self.frequency == other.frequency
        return False

    def __str__(self) -> str:
        return f"[{self.symbol}, {self.frequency}]"

    def __repr__(self) -> str:
        return f"[{self.symbol!r}, {self.frequency}]"


class LeafNode:
    """
    A tree node holding one symbol. Its weight is the symbol's frequency.
    """
    __slots__ = ("_symbol", "_weight")
    is_leaf = True

    def __init__(self, symbol: Symbol, weight: int) -> None:
        self._symbol = symbol
        self._weight = weight

    @property
    def symbol(self) -> Symbol:
        return self._symbol

    @property
    def weight(self) -> int:
        return self._weight

    @classmethod
    def from_frequency(cls, frequency: SymbolFrequency) -> 'LeafNode':
        return cls(frequency.symbol, frequency.frequency)

    def __repr__(self) -> str:
        return f"LeafNode({self.symbol!r}, {self.weight})"


class InternalNode:
    """
    A tree node joining two subtrees. It carries no symbol and its children are fixed.
    """
    __slots__ = ("_left", "_right", "_weight")
    is_leaf = False

    def __init__(self, left: 'TreeNode', right: 'TreeNode') -> None:
        self._left = left
        self._right = right
        self._weight = left.weight + right.weight

    @property
    def left(self) -> 'TreeNode':
        return self._left

    @property
    def right(self) -> 'TreeNode':
        return self._right

    @property
    def weight(self) -> int:
        return self._weight

    def __repr__(self) -> str:
        return f"InternalNode({self.weight}, {self.left!r}, {self.right!r})"


TreeNode = Union[LeafNode, InternalNode]


class CodeTable:
    """
    Maps each symbol of a Huffman tree to its bit-string code.
    """
    def __init__(self) -> None:
        self._codes: Dict[Symbol, str] = {}

    def add(self, symbol: Symbol, code: str) -> None:
        """
        Add the code of a symbol.

        Raises:
            ValueError: If the code is empty, not made of bits, or the symbol already has one.
        """
        if not code or set(code) - {"0", "1"}:
            raise ValueError(f"Invalid code {code!r} for symbol {symbol!r}")
        if symbol in self._codes:
            raise ValueError(f"Symbol {symbol!r} already has a code")
        self._codes[symbol] = code

    def code_for(self, data: str) -> str:
        return self._codes[Symbol(data)]

    def __getitem__(self, symbol: Symbol) -> str:
        return self._codes[symbol]

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._codes

    def __len__(self) -> int:
        return len(self._codes)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._codes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodeTable):
            return False
        return self._codes == other._codes

    def items(self) -> List[Tuple[Symbol, str]]:
        return list(self._codes.items())

    def as_dict(self) -> Dict[str, str]:
        """
        Get the table keyed by plain characters.

        Returns:
            Dict[str, str]: Character to code mapping.
        """
        return {symbol.data: code for symbol, code in self._codes.items()}

    def max_code_length(self) -> int:
        if not self._codes:
            return 0
        return max(len(code) for code in self._codes.values())

    def is_prefix_free(self) -> bool:
        """
        Check that no code is a prefix of another one.

        After sorting, a code that prefixes others is immediately followed by one of them,
        so comparing neighbours is enough.
        """
        codes = sorted(self._codes.values())
        for current, following in zip(codes, codes[1:]):
            if following.startswith(current):
                return False
        return True

    def __repr__(self) -> str:
        return f"CodeTable({self.as_dict()})"
