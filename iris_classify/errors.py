class ClassifierError(Exception):
    detail: str = "Classification pipeline failed"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.detail
        super().__init__(self.detail)


class DatasetError(ClassifierError):
    detail = "Malformed dataset"


class ModelFitError(ClassifierError):
    detail = "Failed to fit model"


class EmptyIndexError(ClassifierError):
    detail = "Cannot build a neighbor index on an empty training set"


class TooManyNeighborsError(ClassifierError):
    detail = "Requested more neighbors than there are indexed points"


class NotFittedError(ClassifierError):
    detail = "Model must be fitted before making predictions"


class MetricsError(ClassifierError):
    detail = "Predicted and actual labels are not aligned"
