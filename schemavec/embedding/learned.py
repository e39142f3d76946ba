"""
LearnedEmbeddingAdapter: plugs a text-embedding model into schemavec.

The hashing extractors never need a trained model. When one is available,
this adapter wraps it behind the same output contract the extractors
honor, so its vector can be blended in by the combiner under the
generator name "learned":

    • fixed length for a given configuration
    • finite values only
    • normalized to unit length

Any callable ``text -> List[float]`` works as a model, for example:

    from sentence_transformers import SentenceTransformer

    st = SentenceTransformer("all-MiniLM-L6-v2")
    adapter = LearnedEmbeddingAdapter(
        model=lambda text: st.encode(text).tolist(),
        target_size=384,
    )

schemavec itself does not depend on any modeling library. With no model
given, the offline deterministic embedding is used.
"""

import math
from typing import List, Optional

from schemavec.embedding.deterministic import compute_embedding
from schemavec.embedding.projector import normalize
from schemavec.errors import ConfigurationError, ModelOutputError
from schemavec.types import TextEmbeddingModel


def reduce_dimensions(vector: List[float], target_size: int) -> List[float]:
    """
    Shrink ``vector`` to ``target_size`` by averaging contiguous buckets.

    Bucket ``i`` covers ``vector[i*n//t : (i+1)*n//t]``. A vector already of
    the target length is returned as a copy.

    Raises
    ------
    ModelOutputError
        If the vector is shorter than ``target_size``.
    """
    n = len(vector)
    if n < target_size:
        raise ModelOutputError(f"Model returned {n} values, cannot reduce to {target_size}.")
    if n == target_size:
        return list(vector)

    reduced = []
    for i in range(target_size):
        start = i * n // target_size
        end = (i + 1) * n // target_size
        bucket = vector[start:end]
        reduced.append(sum(bucket) / len(bucket))
    return reduced


class LearnedEmbeddingAdapter:
    """
    Wraps a text-embedding model behind the extractor output contract.

    Parameters
    ----------
    model : TextEmbeddingModel, optional
        Callable mapping text to a vector. Defaults to a deterministic
        offline embedding of length ``target_size`` (or 1536).
    target_size : int, optional
        Reduce model output to this length. When omitted the model's own
        output length is kept, and it must not change between calls.
    """

    name = "learned"

    def __init__(
        self,
        model: Optional[TextEmbeddingModel] = None,
        target_size: Optional[int] = None,
    ) -> None:
        if target_size is not None and (
            isinstance(target_size, bool) or not isinstance(target_size, int) or target_size <= 0
        ):
            raise ConfigurationError(f"target_size must be a positive integer, got {target_size!r}.")
        self.target_size = target_size

        if model is None:
            dim = target_size or 1536
            model = lambda text: compute_embedding(text, dim)  # noqa: E731
        self.model = model
        self._output_size: Optional[int] = None

    def generate(self, text: str) -> List[float]:
        """
        Embed ``text`` and return a normalized vector.

        Raises
        ------
        ModelOutputError
            If the model returns non-finite values, an empty vector, or a
            length different from earlier calls.
        """
        raw = [float(x) for x in self.model(text)]
        if not raw:
            raise ModelOutputError("Model returned an empty vector.")
        if not all(math.isfinite(x) for x in raw):
            raise ModelOutputError("Model returned non-finite values.")

        if self.target_size is not None:
            raw = reduce_dimensions(raw, self.target_size)
        elif self._output_size is None:
            self._output_size = len(raw)
        elif len(raw) != self._output_size:
            raise ModelOutputError(
                f"Model output length changed from {self._output_size} to {len(raw)}."
            )

        return normalize(raw)
