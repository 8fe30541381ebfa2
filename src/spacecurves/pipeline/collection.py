"""Ordered, owning collection of curves."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple, Type, TypeVar, Union, overload

from spacecurves.curves.base import Curve
from spacecurves.curves.errors import CurveTypeError
from spacecurves.curves.registry import CurveRegistry

C = TypeVar("C", bound=Curve)


class CurveList(Sequence[Curve]):
    """Insertion-ordered sequence of curves.

    The list holds the only strong references the pipeline needs; filtered
    views returned by :meth:`of_kind` reference the same curve instances.
    Duplicates and mixed variants are allowed. The contents are fixed once
    built.
    """

    def __init__(self, curves: Iterable[Curve] = ()) -> None:
        items: List[Curve] = []
        for position, curve in enumerate(curves):
            if not isinstance(curve, Curve):
                raise CurveTypeError(
                    f"Item {position} is {type(curve).__name__}, expected a Curve"
                )
            items.append(curve)
        self._curves: Tuple[Curve, ...] = tuple(items)

    @classmethod
    def build(cls, *curves: Curve) -> CurveList:
        """Convenience constructor: ``CurveList.build(Circle(1), Helix(1, 2))``."""
        return cls(curves)

    @overload
    def __getitem__(self, index: int) -> Curve: ...

    @overload
    def __getitem__(self, index: slice) -> CurveList: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Curve, CurveList]:
        if isinstance(index, slice):
            return CurveList(self._curves[index])
        return self._curves[index]

    def __len__(self) -> int:
        return len(self._curves)

    def __iter__(self) -> Iterator[Curve]:
        return iter(self._curves)

    def of_kind(self, kind: Union[str, Type[C]]) -> Tuple[C, ...]:
        """Curves whose exact type is *kind*, in insertion order.

        Subclasses of *kind* are not matched.
        """
        curve_class = CurveRegistry.resolve(kind)
        return tuple(c for c in self._curves if type(c) is curve_class)  # type: ignore[misc]

    def kind_names(self) -> List[str]:
        return [c.kind_name for c in self._curves]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurveList):
            return NotImplemented
        return self._curves == other._curves

    def __hash__(self) -> int:
        return hash(self._curves)

    def __repr__(self) -> str:
        return f"CurveList({list(self._curves)!r})"


__all__ = ["CurveList"]
