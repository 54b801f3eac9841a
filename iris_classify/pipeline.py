import logging
import sys
from typing import List, NamedTuple

from . import config
from .dataset import load_iris, split_with_ratio
from .errors import ClassifierError
from .knn import KNNClassifier
from .metrics import ConfusionMatrix
from .tree import fit_decision_tree, predict_tree

logger = logging.getLogger(__name__)


class EvaluationReport(NamedTuple):
    model: str
    nsamples: int
    nfeatures: int
    labels: List[int]
    train_size: int
    test_size: int
    confusion: ConfusionMatrix
    accuracy: float


def _evaluate(model_name, dataset, train, test, predictions):
    confusion = ConfusionMatrix.from_predictions(predictions, test.targets)
    accuracy = confusion.accuracy()
    logger.info("%s accuracy: %.4f", model_name, accuracy)
    return EvaluationReport(
        model=model_name,
        nsamples=dataset.nsamples(),
        nfeatures=dataset.nfeatures(),
        labels=dataset.labels(),
        train_size=train.nsamples(),
        test_size=test.nsamples(),
        confusion=confusion,
        accuracy=accuracy,
    )


def run_decision_tree(
    dataset,
    ratio=config.SPLIT_RATIO,
    seed=config.RANDOM_STATE,
    **params,
):
    train, test = split_with_ratio(dataset, ratio, seed)
    model = fit_decision_tree(train, **params)
    predictions = predict_tree(model, test)
    return _evaluate("decision tree", dataset, train, test, predictions)


def run_knn(
    dataset,
    ratio=config.SPLIT_RATIO,
    seed=config.RANDOM_STATE,
    k=config.NUM_NEIGHBORS,
    algorithm=config.KNN_ALGORITHM,
):
    train, test = split_with_ratio(dataset, ratio, seed)
    classifier = KNNClassifier(k=k, algorithm=algorithm).fit(train)
    predictions = classifier.predict(test.records)
    return _evaluate(f"k-NN (k={k})", dataset, train, test, predictions)


def format_report(report):
    target_names = "{" + ", ".join(str(label) for label in report.labels) + "}"
    return "\n".join([
        f"Number of samples: {report.nsamples}",
        f"Number of features: {report.nfeatures}",
        f"Target names: {target_names}",
        f"Training samples: {report.train_size}",
        f"Testing samples: {report.test_size}",
        f"Model accuracy: {report.accuracy * 100:.2f}%",
    ])


def main():
    try:
        dataset = load_iris()
        tree_report = run_decision_tree(dataset)
        knn_report = run_knn(dataset)
    except ClassifierError as exc:
        logger.error("%s", exc.detail)
        return 1
    print(format_report(tree_report))
    print(f"{knn_report.model} accuracy: {knn_report.accuracy * 100:.2f}%")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    sys.exit(main())
