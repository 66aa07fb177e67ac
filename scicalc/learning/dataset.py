"""Dataset validation shared by the classifiers.

A dataset is a sequence of ``(features, label)`` pairs. Labels are class
identifiers for classification and real targets for regression.
"""

from __future__ import annotations

from typing import Hashable, Sequence

import numpy as np

from scicalc.core.errors import InvalidArgument
from scicalc.utils.validation import as_matrix, as_vector

Sample = tuple[Sequence[float], Hashable]
Dataset = Sequence[Sample]


def split_dataset(
    data: Dataset, point: Sequence[float] | None = None
) -> tuple[np.ndarray, list[Hashable], np.ndarray | None]:
    """Unpack a dataset into a feature matrix and a label list.

    Args:
        data: Non-empty sequence of ``(features, label)`` pairs with
              equal-length feature vectors.
        point: Optional query point, checked against the feature length.

    Returns:
        ``(X, labels, query)`` where ``query`` is None when no point was given.
    """
    if len(data) == 0:
        raise InvalidArgument("Dataset is empty")
    try:
        features = [row[0] for row in data]
        labels = [row[1] for row in data]
    except (TypeError, IndexError) as exc:
        raise InvalidArgument(f"Dataset rows must be (features, label) pairs: {exc}") from exc

    X = as_matrix(features, "features")
    query = None
    if point is not None:
        query = as_vector(point, "point")
        if query.size != X.shape[1]:
            raise InvalidArgument(
                f"Point has {query.size} features, training data has {X.shape[1]}"
            )
    return X, labels, query
