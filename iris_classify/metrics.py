import numpy as np
import pandas as pd
from sklearn.metrics import confusion_matrix, matthews_corrcoef, precision_recall_fscore_support

from .errors import MetricsError


def _aligned(actual, predicted):
    actual = np.asarray(actual)
    predicted = np.asarray(predicted)
    if actual.ndim != 1 or predicted.ndim != 1:
        raise MetricsError("label sequences must be 1D")
    if actual.shape != predicted.shape:
        raise MetricsError(
            f"got {actual.shape[0]} actual labels but {predicted.shape[0]} predictions"
        )
    if actual.shape[0] == 0:
        raise MetricsError("cannot score an empty prediction set")
    return actual, predicted


def accuracy_metric(actual, predicted):
    actual, predicted = _aligned(actual, predicted)
    correct = sum(1 for a, p in zip(actual, predicted) if a == p)
    return correct / len(actual)


class ConfusionMatrix:
    """Counts of (true label, predicted label) pairs.

    ``table`` is a square ``DataFrame`` indexed by true label (rows) and
    predicted label (columns) over every label seen on either side.
    """

    def __init__(self, actual, predicted):
        self.actual, self.predicted = _aligned(actual, predicted)
        labels = sorted(set(self.actual.tolist()) | set(self.predicted.tolist()))
        self.table = pd.DataFrame(
            confusion_matrix(self.actual, self.predicted, labels=labels),
            index=pd.Index(labels, name="actual"),
            columns=pd.Index(labels, name="predicted"),
        )

    @classmethod
    def from_predictions(cls, predicted, actual):
        return cls(actual, predicted)

    @property
    def labels(self):
        return list(self.table.index)

    def total(self):
        return int(self.table.to_numpy().sum())

    def trace(self):
        return int(np.trace(self.table.to_numpy()))

    def accuracy(self):
        return self.trace() / self.total()

    def _scores(self):
        return precision_recall_fscore_support(
            self.actual, self.predicted, labels=self.labels, zero_division=0
        )

    def _per_label(self, values):
        return {label: float(value) for label, value in zip(self.labels, values)}

    def precision(self):
        precision, _, _, _ = self._scores()
        return self._per_label(precision)

    def recall(self):
        _, recall, _, _ = self._scores()
        return self._per_label(recall)

    def f1_score(self):
        _, _, f1, _ = self._scores()
        return self._per_label(f1)

    def mcc(self):
        """Multi-class Matthews correlation coefficient."""
        return float(matthews_corrcoef(self.actual, self.predicted))
