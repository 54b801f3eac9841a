import math
import sys
import pathlib

import pytest

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from iris_classify.errors import MetricsError
from iris_classify.metrics import ConfusionMatrix, accuracy_metric

ACTUAL = [0, 0, 1, 1, 2, 2]
PREDICTED = [0, 1, 1, 1, 2, 0]


def test_confusion_matrix_counts():
    cm = ConfusionMatrix.from_predictions(PREDICTED, ACTUAL)
    assert cm.labels == [0, 1, 2]
    assert cm.table.loc[0].tolist() == [1, 1, 0]
    assert cm.table.loc[1].tolist() == [0, 2, 0]
    assert cm.table.loc[2].tolist() == [1, 0, 1]
    assert cm.total() == 6
    assert cm.trace() == 4


def test_accuracy_matches_independent_count():
    cm = ConfusionMatrix.from_predictions(PREDICTED, ACTUAL)
    assert cm.accuracy() == pytest.approx(accuracy_metric(ACTUAL, PREDICTED))
    assert cm.accuracy() == pytest.approx(cm.trace() / cm.total())
    assert cm.accuracy() == pytest.approx(2 / 3)


def test_per_class_scores():
    cm = ConfusionMatrix.from_predictions(PREDICTED, ACTUAL)
    assert cm.precision() == pytest.approx({0: 0.5, 1: 2 / 3, 2: 1.0})
    assert cm.recall() == pytest.approx({0: 0.5, 1: 1.0, 2: 0.5})
    assert cm.f1_score() == pytest.approx({0: 0.5, 1: 0.8, 2: 2 / 3})


def test_label_seen_only_in_predictions():
    cm = ConfusionMatrix.from_predictions([0, 3], [0, 0])
    assert cm.labels == [0, 3]
    assert cm.table.shape == (2, 2)
    assert cm.recall()[3] == 0.0
    assert cm.precision()[3] == 0.0


def test_mcc():
    perfect = ConfusionMatrix.from_predictions(ACTUAL, ACTUAL)
    assert perfect.mcc() == pytest.approx(1.0)
    single_class = ConfusionMatrix.from_predictions([1, 1], [1, 1])
    assert single_class.mcc() == 0.0


def test_mcc_on_mixed_predictions():
    # rows [[1, 1, 0], [0, 2, 0], [1, 0, 1]]: s=6, c=4, t=[2, 2, 2], p=[2, 3, 1]
    cm = ConfusionMatrix.from_predictions(PREDICTED, ACTUAL)
    assert cm.mcc() == pytest.approx((4 * 6 - 12) / math.sqrt((36 - 14) * (36 - 12)))


def test_scores_follow_input_sequences():
    cm = ConfusionMatrix.from_predictions(PREDICTED, ACTUAL)
    assert cm.actual.tolist() == ACTUAL
    assert cm.predicted.tolist() == PREDICTED
    assert set(cm.f1_score()) == set(cm.labels)


def test_misaligned_labels():
    with pytest.raises(MetricsError):
        ConfusionMatrix.from_predictions([0, 1], [0, 1, 2])
    with pytest.raises(MetricsError):
        accuracy_metric([0], [0, 1])


def test_empty_labels():
    with pytest.raises(MetricsError, match="empty"):
        ConfusionMatrix.from_predictions([], [])
