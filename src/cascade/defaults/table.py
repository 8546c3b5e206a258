"""Default table: the house variant order for every built-in utility plugin."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType

from cascade.model.variant import VariantList, cast_variants, ensure_unique

_R = ("responsive",)
_RF = ("responsive", "focus")
_RHF = ("responsive", "hover", "focus")

# Declaration order here is the order plugins are emitted in.
DEFAULT_VARIANTS: Mapping[str, VariantList] = MappingProxyType({
    "accessibility": _RF,
    "alignContent": _R,
    "alignItems": _R,
    "alignSelf": _R,
    "appearance": _R,
    "backgroundAttachment": _R,
    "backgroundColor": _RHF,
    "backgroundOpacity": _RHF,
    "backgroundPosition": _R,
    "backgroundRepeat": _R,
    "backgroundSize": _R,
    "borderCollapse": _R,
    "borderColor": _RHF,
    "borderOpacity": _RHF,
    "borderRadius": _R,
    "borderStyle": _R,
    "borderWidth": _R,
    "boxShadow": _RHF,
    "boxSizing": _R,
    "cursor": _R,
    "display": _R,
    "divideColor": _R,
    "divideOpacity": _R,
    "divideWidth": _R,
    "fill": _R,
    "flex": _R,
    "flexDirection": _R,
    "flexGrow": _R,
    "flexShrink": _R,
    "flexWrap": _R,
    "float": _R,
    "clear": _R,
    "fontFamily": _R,
    "fontSize": _R,
    "fontSmoothing": _R,
    "fontStyle": _R,
    "fontWeight": _RHF,
    "height": _R,
    "inset": _R,
    "justifyContent": _R,
    "letterSpacing": _R,
    "lineHeight": _R,
    "listStylePosition": _R,
    "listStyleType": _R,
    "margin": _R,
    "maxHeight": _R,
    "maxWidth": _R,
    "minHeight": _R,
    "minWidth": _R,
    "objectFit": _R,
    "objectPosition": _R,
    "opacity": _RHF,
    "order": _R,
    "outline": _RF,
    "overflow": _R,
    "padding": _R,
    "placeholderColor": _RF,
    "placeholderOpacity": _RF,
    "pointerEvents": _R,
    "position": _R,
    "resize": _R,
    "space": _R,
    "stroke": _R,
    "strokeWidth": _R,
    "tableLayout": _R,
    "textAlign": _R,
    "textColor": _RHF,
    "textOpacity": _RHF,
    "textDecoration": _RHF,
    "textTransform": _R,
    "userSelect": _R,
    "verticalAlign": _R,
    "visibility": _R,
    "whitespace": _R,
    "width": _R,
    "wordBreak": _R,
    "zIndex": _R,
    "gap": _R,
    "gridAutoFlow": _R,
    "gridTemplateColumns": _R,
    "gridColumn": _R,
    "gridColumnStart": _R,
    "gridColumnEnd": _R,
    "gridTemplateRows": _R,
    "gridRow": _R,
    "gridRowStart": _R,
    "gridRowEnd": _R,
    "transform": _R,
    "transformOrigin": _R,
    "scale": _RHF,
    "rotate": _RHF,
    "translate": _RHF,
    "skew": _RHF,
    "transitionProperty": _R,
    "transitionTimingFunction": _R,
    "transitionDuration": _R,
    "transitionDelay": _R,
    "animation": _R,
})


class DefaultTable:
    """Immutable mapping from plugin id to its default variant list.

    Unknown plugins are not an error here: :meth:`lookup` returns an empty
    list for them.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, Sequence[str]] | None = None) -> None:
        frozen: dict[str, VariantList] = {}
        for plugin_id, variants in (entries or {}).items():
            frozen[plugin_id] = ensure_unique(plugin_id, cast_variants(variants))
        object.__setattr__(self, "_entries", MappingProxyType(frozen))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("DefaultTable is immutable")

    def lookup(self, plugin_id: str) -> VariantList:
        return self._entries.get(plugin_id, ())

    def plugins(self) -> tuple[str, ...]:
        """Plugin ids in declaration order."""
        return tuple(self._entries)

    def as_mapping(self) -> Mapping[str, VariantList]:
        return self._entries

    def __contains__(self, plugin_id: object) -> bool:
        return plugin_id in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"DefaultTable({len(self._entries)} plugins)"


DEFAULT_TABLE = DefaultTable(DEFAULT_VARIANTS)
