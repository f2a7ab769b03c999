"""
Feature extraction, standardization and linear discriminant projection
for the game scatter plot.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import numpy as np
import pandas as pd
from scipy import linalg
from sklearn.preprocessing import StandardScaler

from ..data.records import GameRecord
from ..utils.number_cleaner import NonNumericValue, coerce_feature

logger = logging.getLogger(__name__)

FEATURE_COLUMNS = [
    "minplayers",
    "maxplayers",
    "minplaytime",
    "maxplaytime",
    "minage",
    "rating",
    "num_of_reviews",
]


class FeatureExtractionError(ValueError):
    """Raised when a game has a non-numeric value in a projection feature."""

    def __init__(self, feature: str, value, title=None):
        self.feature = feature
        self.value = value
        self.title = title
        super().__init__(f"{title!r}: feature '{feature}' is not numeric ({value!r})")


def _score_value(rating):
    # Raw JSON value when loaded, so placeholders like "N/A" are still caught
    return rating.score if rating.raw_score is None else rating.raw_score


def _raw_features(record: GameRecord) -> List[Tuple[str, object]]:
    rating = record.rating
    return [
        ("minplayers", record.minplayers),
        ("maxplayers", record.maxplayers),
        ("minplaytime", record.minplaytime),
        ("maxplaytime", record.maxplaytime),
        ("minage", record.minage),
        ("rating", None if rating is None else _score_value(rating)),
        ("num_of_reviews", None if rating is None else rating.num_of_reviews),
    ]


def extract_feature_vector(record: GameRecord) -> np.ndarray:
    """
    Build the 7-dimensional feature vector of a game.

    Missing values default to 0 (see coerce_feature for the full rules).

    Raises:
        FeatureExtractionError: If any feature is non-numeric
    """
    values = []
    for feature, raw in _raw_features(record):
        try:
            values.append(coerce_feature(raw))
        except NonNumericValue:
            raise FeatureExtractionError(feature, raw, record.title) from None
    return np.array(values, dtype=float)


def build_feature_matrix(
    records: Sequence[GameRecord],
    categories: Sequence[str]
) -> Tuple[pd.DataFrame, np.ndarray, List[GameRecord]]:
    """
    Feature matrix for games whose first category is selected.

    Games with a non-numeric feature are dropped, so the returned rows,
    labels and games are aligned with each other, not with the input.

    Args:
        records: All games
        categories: Selected categories; position gives the integer label

    Returns:
        (feature DataFrame, label array, kept games)
    """
    selected = list(categories)
    rows, labels, kept = [], [], []

    for record in records:
        category = record.primary_category
        if category is None or category not in selected:
            continue
        try:
            vector = extract_feature_vector(record)
        except FeatureExtractionError as e:
            logger.debug(f"Excluding game from projection: {e}")
            continue
        rows.append(vector)
        labels.append(selected.index(category))
        kept.append(record)

    matrix = pd.DataFrame(
        np.vstack(rows) if rows else np.empty((0, len(FEATURE_COLUMNS))),
        columns=FEATURE_COLUMNS,
    )
    return matrix, np.array(labels, dtype=int), kept


def standardize(X) -> np.ndarray:
    """
    Standardize columns to zero mean and unit population variance.

    A column with zero standard deviation becomes exactly zero.

    Args:
        X: Feature array or DataFrame (n_samples, n_features)

    Returns:
        Standardized array
    """
    values = np.asarray(X, dtype=float)
    if values.ndim != 2 or values.shape[0] == 0:
        raise ValueError(f"Expected a non-empty 2-D matrix, got shape {values.shape}")

    Z = StandardScaler().fit_transform(values)

    # The fitted mean of e.g. [0.1, 0.1, 0.1] is off by one ulp
    Z[:, np.ptp(values, axis=0) == 0] = 0.0
    return Z


def scatter_matrices(X: np.ndarray, labels: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Between-class and within-class scatter matrices.

    S_b = sum_c n_c (mu_c - mu)(mu_c - mu)^T
    S_w = sum_c sum_{x in c} (x - mu_c)(x - mu_c)^T
    """
    n_features = X.shape[1]
    overall_mean = X.mean(axis=0)
    S_b = np.zeros((n_features, n_features))
    S_w = np.zeros((n_features, n_features))

    for label in np.unique(labels):
        members = X[labels == label]
        class_mean = members.mean(axis=0)
        diff = (class_mean - overall_mean).reshape(-1, 1)
        S_b += len(members) * (diff @ diff.T)
        centered = members - class_mean
        S_w += centered.T @ centered

    return S_b, S_w


def lda_projection(
    X: np.ndarray,
    labels: Sequence[int],
    n_components: int = 2,
    ridge: float = 1e-6
) -> np.ndarray:
    """
    Project X onto its leading linear discriminant directions.

    Solves S_b v = lambda (S_w + r I) v and keeps the eigenvectors of the
    n_components largest eigenvalues. r is ridge scaled by the mean diagonal
    of S_w, which keeps constant (all-zero) columns solvable. Unlike
    sklearn's LinearDiscriminantAnalysis the number of components is not
    capped at n_classes - 1, so two classes still give a 2-D result.

    Each direction's sign is fixed so that its largest-magnitude entry is
    positive, making the output deterministic for a given input.

    Args:
        X: Standardized feature matrix (n_samples, n_features)
        labels: Integer class label per row
        n_components: Output dimensionality
        ridge: Relative regularization of the within-class scatter

    Returns:
        Projected array (n_samples, n_components)
    """
    X = np.asarray(X, dtype=float)
    labels = np.asarray(labels)

    if X.ndim != 2:
        raise ValueError(f"Expected a 2-D matrix, got shape {X.shape}")
    if len(labels) != X.shape[0]:
        raise ValueError(f"Got {len(labels)} labels for {X.shape[0]} rows")
    if not 1 <= n_components <= X.shape[1]:
        raise ValueError(
            f"n_components must be between 1 and {X.shape[1]}, got {n_components}"
        )

    S_b, S_w = scatter_matrices(X, labels)

    n_features = X.shape[1]
    scale = max(np.trace(S_w) / n_features, 1.0)
    S_w_reg = S_w + ridge * scale * np.eye(n_features)

    eigvals, eigvecs = linalg.eigh(S_b, S_w_reg)

    # eigh returns ascending eigenvalues
    W = eigvecs[:, ::-1][:, :n_components].copy()

    for j in range(W.shape[1]):
        pivot = np.argmax(np.abs(W[:, j]))
        if W[pivot, j] < 0:
            W[:, j] = -W[:, j]

    return X @ W
