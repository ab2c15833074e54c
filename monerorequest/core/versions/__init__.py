from typing import Callable, Dict, Tuple

from ..base import Fields
from . import v1

Encoder = Callable[[Fields], str]
Decoder = Callable[[str], Fields]

# version token -> (encoder, decoder)
VERSIONS: Dict[str, Tuple[Encoder, Decoder]] = {
    "1": (v1.encode, v1.decode),
}
