"""
Extraction capability: how an arbitrary object yields the text fragments to embed.

Objects either implement the ``Embeddable`` protocol (an ``embeddable()`` method)
or the builder is given a ``TextExtractor`` callable. Plain strings embed as
themselves.
"""

from typing import Any, Callable, Iterable, Protocol, runtime_checkable

from docembed.services.embedder.errors import EmptyListError, ExtractionError
from docembed.utils.one_or_many import OneOrMany

TextExtractor = Callable[[Any], Iterable[str]]


@runtime_checkable
class Embeddable(Protocol):
    """Any object exposing ``embeddable()`` returning one or more text fragments."""

    def embeddable(self) -> Iterable[str]:
        ...


def _default_extractor(obj: Any) -> Iterable[str]:
    if isinstance(obj, str):
        return [obj]
    if isinstance(obj, Embeddable):
        return obj.embeddable()
    raise ExtractionError(
        f"{type(obj).__name__} is not embeddable: implement embeddable() or pass an extractor"
    )


def extract_fragments(obj: Any, extractor: TextExtractor | None = None) -> OneOrMany[str]:
    """
    Run extraction on ``obj`` and return its fragments.
    Raises ExtractionError on zero fragments, non-string fragments, or any extractor failure.
    """
    fn = extractor or _default_extractor
    try:
        raw = fn(obj)
        if isinstance(raw, str):
            raw = [raw]
        fragments = OneOrMany.many(raw)
    except ExtractionError:
        raise
    except EmptyListError as e:
        raise ExtractionError(f"{type(obj).__name__} produced no text fragments", cause=e) from e
    except Exception as e:
        raise ExtractionError(f"Fragment extraction failed: {e}", cause=e) from e
    for fragment in fragments:
        if not isinstance(fragment, str):
            raise ExtractionError(
                f"Fragments must be str, got {type(fragment).__name__} from {type(obj).__name__}"
            )
    return fragments
