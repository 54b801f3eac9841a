import logging

import numpy as np
from sklearn.tree import DecisionTreeClassifier

from . import config
from .errors import ModelFitError, NotFittedError

logger = logging.getLogger(__name__)


def fit_decision_tree(train, **params):
    """Fit a classification tree on ``train``.

    ``params`` override the defaults in ``config.TREE_PARAMS``. Any failure
    inside the library surfaces as ``ModelFitError``.
    """
    tree_params = {**config.TREE_PARAMS, **params}
    try:
        model = DecisionTreeClassifier(**tree_params)
        model.fit(train.records, train.targets)
    except (ValueError, TypeError) as exc:
        raise ModelFitError(f"Failed to fit decision tree: {exc}") from exc
    logger.info(
        "Fitted decision tree on %d samples (depth %d, %d leaves)",
        train.nsamples(),
        model.get_depth(),
        model.get_n_leaves(),
    )
    return model


def predict_tree(model, test):
    if not hasattr(model, "tree_"):
        raise NotFittedError()
    if test.nsamples() == 0:
        return np.empty(0, dtype=int)
    return model.predict(test.records).astype(int)
