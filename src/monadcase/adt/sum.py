"""Generic sum types (tagged unions) with generated constructors and exhaustive matching.

A sum type is a family of variants sharing a discriminant field. Each variant
is a frozen pydantic model whose discriminant is annotated ``Literal["tag"]``.
``sum_type`` collects the variants and provides:

- one constructor per variant, taking only the non-discriminant fields
- ``match``/``matcher``, which refuse any handler map that does not cover
  every declared tag, before anything is dispatched

Variants may be declared as classes or inline as ``{field: type}`` dicts.

Example:
    >>> class Circle(Variant):
    ...     kind: Literal["circle"]
    ...     radius: float
    >>> Shape = sum_type("Shape", Circle, square={"side": float})
    >>> area = Shape.matcher({
    ...     "circle": lambda c: 3.14 * c.radius ** 2,
    ...     "square": lambda s: s.side ** 2,
    ... })
    >>> area(Shape.square(side=2.0))
    4.0

    Leaving out the "square" handler raises NonExhaustiveMatchError before
    any handler runs.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Literal, TypeVar, get_args, get_origin
from weakref import WeakKeyDictionary, ref

from pydantic import BaseModel, ConfigDict, create_model

from ..foundation.config import get_settings
from ..foundation.errors import NonExhaustiveMatchError, UnknownVariantError, VariantDefinitionError
from ..foundation.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

D = TypeVar("D")

logger = get_logger("adt")

# Variant class -> weak ref to its owning SumType; a dead ref means unowned
_OWNERS: WeakKeyDictionary[type, ref[SumType]] = WeakKeyDictionary()


class Variant(BaseModel):
    """Base for sum-type variants: immutable, no undeclared fields."""

    model_config = ConfigDict(frozen=True, extra="forbid")


# ═════════════════════════════════════════════════════════════════════════════
# Sum Type
# ═════════════════════════════════════════════════════════════════════════════


class SumType:
    """A closed set of variants keyed by their discriminant tag.

    Constructors are reachable as attributes (``Shape.circle(radius=1)``) when
    the tag is an identifier, and always through ``constructors[tag]``.
    """

    __slots__ = ("name", "discriminator", "_variants", "_constructors", "__weakref__")

    def __init__(self, name: str, variants: dict[str, type[Variant]], discriminator: str) -> None:
        self.name = name
        self.discriminator = discriminator
        self._variants = MappingProxyType(dict(variants))
        self._constructors = MappingProxyType({tag: self._constructor(tag, cls) for tag, cls in variants.items()})

    def _constructor(self, tag: str, cls: type[Variant]) -> Callable[..., Variant]:
        disc, owner = self.discriminator, self.name

        def construct(**fields: Any) -> Variant:
            if disc in fields:
                raise TypeError(f"{owner}.{tag}() sets '{disc}' itself; do not pass it")
            return cls(**{disc: tag, **fields})

        construct.__name__ = construct.__qualname__ = tag
        construct.__doc__ = f"Construct the '{tag}' variant of {owner}."
        return construct

    # ─── Introspection ───────────────────────────────────────────────

    @property
    def tags(self) -> tuple[str, ...]:
        """Declared tags, in declaration order."""
        return tuple(self._variants)

    @property
    def variants(self) -> Mapping[str, type[Variant]]:
        return self._variants

    @property
    def constructors(self) -> Mapping[str, Callable[..., Variant]]:
        return self._constructors

    def tag_of(self, value: object) -> str:
        """Tag of a member value.

        Raises:
            UnknownVariantError: If value is not a variant of this sum
        """
        tag = getattr(value, self.discriminator, None)
        cls = self._variants.get(tag) if isinstance(tag, str) else None
        if cls is None or not isinstance(value, cls):
            raise UnknownVariantError.create(
                f"{type(value).__name__} value is not a variant of {self.name}",
                details=f"declared tags: {', '.join(self.tags)}",
            )
        return tag  # type: ignore[return-value]

    def __contains__(self, value: object) -> bool:
        tag = getattr(value, self.discriminator, None)
        cls = self._variants.get(tag) if isinstance(tag, str) else None
        return cls is not None and isinstance(value, cls)

    def __getattr__(self, tag: str) -> Callable[..., Variant]:
        if tag.startswith("_"):
            raise AttributeError(tag)
        try:
            return self._constructors[tag]
        except KeyError:
            raise AttributeError(f"{self.name} has no variant {tag!r}") from None

    def __repr__(self) -> str:
        return f"SumType({self.name}: {' | '.join(self.tags)})"

    # ─── Matching ────────────────────────────────────────────────────

    def check_handlers(self, handlers: Mapping[str, Callable[[Any], Any]]) -> None:
        """Reject handler maps that miss a tag, name an unknown tag, or hold non-callables."""
        keys = set(handlers)
        if missing := [t for t in self.tags if t not in keys]:
            logger.warning("Non-exhaustive match on %s, missing %s", self.name, missing)
            raise NonExhaustiveMatchError.create(
                f"match on {self.name} has no handler for: {', '.join(missing)}",
                details=f"declared tags: {', '.join(self.tags)}",
            )
        if unknown := sorted(keys - set(self._variants), key=str):
            logger.warning("Unknown tags in match on %s: %s", self.name, unknown)
            raise UnknownVariantError.create(
                f"match on {self.name} names undeclared tags: {', '.join(map(str, unknown))}",
                details=f"declared tags: {', '.join(self.tags)}",
            )
        if not_callable := [t for t in self.tags if not callable(handlers[t])]:
            raise TypeError(f"handlers for {', '.join(not_callable)} are not callable")

    def matcher(self, handlers: Mapping[str, Callable[[Any], D]]) -> Callable[[Variant], D]:
        """Validate handlers once and return a reusable dispatcher."""
        self.check_handlers(handlers)
        table = dict(handlers)

        def dispatch(value: Variant) -> D:
            return table[self.tag_of(value)](value)

        return dispatch

    def match(self, value: Variant, handlers: Mapping[str, Callable[[Any], D]]) -> D:
        """Dispatch value to the handler for its tag. Handlers must be exhaustive."""
        self.check_handlers(handlers)
        return handlers[self.tag_of(value)](value)


# Tags that attribute access would resolve to SumType members instead of constructors
_RESERVED_TAGS = frozenset(n for n in dir(SumType) if not n.startswith("_"))


# ═════════════════════════════════════════════════════════════════════════════
# Definition
# ═════════════════════════════════════════════════════════════════════════════


def _tag_of_class(cls: type[Variant], discriminator: str) -> str:
    field = cls.model_fields.get(discriminator)
    if field is None:
        raise VariantDefinitionError.create(f"{cls.__name__} has no discriminant field '{discriminator}'")
    args = get_args(field.annotation)
    if get_origin(field.annotation) is not Literal or len(args) != 1 or not isinstance(args[0], str):
        raise VariantDefinitionError.create(
            f"{cls.__name__}.{discriminator} must be annotated Literal['<tag>']",
            details=f"got {field.annotation!r}",
        )
    return args[0]


def _inline_variant(sum_name: str, tag: str, fields: Mapping[str, Any], discriminator: str) -> type[Variant]:
    if discriminator in fields:
        raise VariantDefinitionError.create(f"inline variant {tag!r} must not declare '{discriminator}'")
    spec = {k: v if isinstance(v, tuple) else (v, ...) for k, v in fields.items()}
    name = "".join(part.capitalize() for part in tag.split("_")) or tag
    return create_model(  # type: ignore[call-overload]
        name,
        __base__=Variant,
        __module__=__name__,
        __doc__=f"'{tag}' variant of {sum_name}.",
        **{discriminator: (Literal[tag], tag)},
        **spec,
    )


def sum_type(
    name: str,
    /,
    *variants: type[Variant],
    discriminator: str | None = None,
    **inline: Mapping[str, Any],
) -> SumType:
    """Define a sum type from variant classes and/or inline field specs.

    Args:
        name: Name of the sum type (used in messages)
        *variants: Variant subclasses with a ``Literal`` discriminant
        discriminator: Discriminant field name; defaults to ``settings.adt_discriminator``
        **inline: tag -> {field: type | (type, default)} for generated variants

    Raises:
        VariantDefinitionError: On empty, duplicate, mutable or malformed variants,
            tags that shadow SumType attributes, or a variant class already
            owned by another live sum type
    """
    disc = discriminator or get_settings().adt_discriminator
    if not variants and not inline:
        raise VariantDefinitionError.create(f"sum type {name} declares no variants")

    table: dict[str, type[Variant]] = {}
    for cls in variants:
        if not (isinstance(cls, type) and issubclass(cls, Variant)):
            raise VariantDefinitionError.create(f"{cls!r} is not a Variant subclass")
        if not cls.model_config.get("frozen"):
            raise VariantDefinitionError.create(f"{cls.__name__} must stay frozen")
        tag = _tag_of_class(cls, disc)
        if tag in table:
            raise VariantDefinitionError.create(f"duplicate tag {tag!r} in sum type {name}")
        table[tag] = cls
    if duplicate := sorted(set(table) & set(inline)):
        raise VariantDefinitionError.create(f"duplicate tag {duplicate[0]!r} in sum type {name}")
    if reserved := sorted((set(table) | set(inline)) & _RESERVED_TAGS):
        raise VariantDefinitionError.create(
            f"tags {', '.join(reserved)} in sum type {name} would shadow SumType attributes",
        )
    for tag, fields in inline.items():
        table[tag] = _inline_variant(name, tag, fields, disc)

    for cls in table.values():
        if (owner := _owner_of(cls)) is not None:
            raise VariantDefinitionError.create(f"{cls.__name__} already belongs to {owner.name}")

    result = SumType(name, table, disc)
    for cls in table.values():
        _OWNERS[cls] = ref(result)
    logger.debug("Defined sum type %s with tags %s", name, result.tags)
    return result


def _owner_of(cls: type) -> SumType | None:
    owner = _OWNERS.get(cls)
    return owner() if owner is not None else None


def sum_of(value: object) -> SumType:
    """Sum type owning value's variant class.

    Raises:
        UnknownVariantError: If value's class belongs to no live sum type
    """
    owner = _owner_of(type(value))
    if owner is None:
        raise UnknownVariantError.create(f"{type(value).__name__} is not a variant of any sum type")
    return owner


def match(value: Variant, handlers: Mapping[str, Callable[[Any], D]]) -> D:
    """Exhaustive match resolving the sum type from value itself."""
    return sum_of(value).match(value, handlers)
