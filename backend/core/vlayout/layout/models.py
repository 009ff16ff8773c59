# layout/models.py
"""
Modelos del layout de bloques SPED.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class BlockDefinition:
    """Definición de un bloque (registro) del layout."""
    registro: str
    label: str
    field_names: Tuple[str, ...] = ()

    @property
    def expected_field_count(self) -> int:
        # El primer elemento declarado es el código del registro, no un campo
        return len(self.field_names)


@dataclass(frozen=True)
class LayoutSchema:
    """
    Layout inmutable: registro -> definición, en orden de declaración.

    El orden de declaración es el orden canónico usado en todas las
    salidas (ocurrencias, bloques faltantes, uniones agregadas).
    """
    blocks: Mapping[str, BlockDefinition]
    source: Optional[str] = None
    _order: Tuple[str, ...] = field(init=False, repr=False, compare=False)
    _positions: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        frozen_blocks = MappingProxyType(dict(self.blocks))
        order = tuple(frozen_blocks.keys())
        object.__setattr__(self, "blocks", frozen_blocks)
        object.__setattr__(self, "_order", order)
        object.__setattr__(self, "_positions", MappingProxyType(
            {registro: index for index, registro in enumerate(order)}
        ))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, List[str]], source: Optional[str] = None) -> "LayoutSchema":
        """Construye el layout desde el mapeo registro -> [label, campo1, ...]."""
        blocks: Dict[str, BlockDefinition] = {}
        for registro, declared in raw.items():
            blocks[registro] = BlockDefinition(
                registro=registro,
                label=declared[0],
                field_names=tuple(declared[1:])
            )
        return cls(blocks=blocks, source=source)

    def expected_field_count(self, registro: str) -> Optional[int]:
        """Cantidad de campos esperada, o None si el registro no está en el layout."""
        block = self.blocks.get(registro)
        if block is None:
            return None
        return block.expected_field_count

    def canonical_order(self) -> Tuple[str, ...]:
        return self._order

    def sort_key(self, registro: str) -> Tuple[int, int]:
        position = self._positions.get(registro)
        if position is None:
            return (1, 0)
        return (0, position)

    def sort_registros(self, registros: Iterable[str]) -> List[str]:
        """
        Ordena registros por el orden canónico del layout.

        Los registros desconocidos quedan al final, en el orden en que
        llegaron (sorted es estable).
        """
        return sorted(registros, key=self.sort_key)

    def __contains__(self, registro: object) -> bool:
        return registro in self.blocks

    def __len__(self) -> int:
        return len(self.blocks)
