from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import joblib
import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.linear_model import LogisticRegression
from sklearn.pipeline import Pipeline

from bluecanary.common.exceptions import BadRequestError
from bluecanary.logger import init_logger
from bluecanary.service.corpus import REVIEWS

logger = init_logger(__name__)


@dataclass(frozen=True)
class Prediction:
    sentiment: str
    confidence: float


class SentimentModel:
    """Fitted text classifier mapping a review to a sentiment label."""

    def __init__(self, pipeline: Pipeline):
        if not hasattr(pipeline, "classes_"):
            raise ValueError("pipeline must be fitted before serving predictions")
        self._pipeline = pipeline

    @classmethod
    def train(cls, samples: Iterable[tuple[str, str]]) -> "SentimentModel":
        samples = list(samples)
        texts = [text for text, _ in samples]
        labels = [label for _, label in samples]
        if len(set(labels)) < 2:
            raise ValueError("training data must contain at least two sentiment labels")

        pipeline = Pipeline(
            [
                ("tfidf", TfidfVectorizer(ngram_range=(1, 2), sublinear_tf=True)),
                ("clf", LogisticRegression(C=10.0, max_iter=1000)),
            ]
        )
        pipeline.fit(texts, labels)
        logger.info(f"Trained sentiment model on {len(texts)} reviews, classes={list(pipeline.classes_)}")
        return cls(pipeline)

    @classmethod
    def default(cls) -> "SentimentModel":
        return cls.train(REVIEWS)

    @classmethod
    def load(cls, path: str | Path) -> "SentimentModel":
        pipeline = joblib.load(path)
        logger.info(f"Loaded sentiment model from {path}")
        return cls(pipeline)

    def save(self, path: str | Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        joblib.dump(self._pipeline, path)
        logger.info(f"Saved sentiment model to {path}")
        return path

    @property
    def classes(self) -> list[str]:
        return [str(label) for label in self._pipeline.classes_]

    def predict(self, review: str) -> Prediction:
        if not review or not review.strip():
            raise BadRequestError("review must be a non-empty string")

        probabilities = self._pipeline.predict_proba([review])[0]
        best = int(np.argmax(probabilities))
        return Prediction(
            sentiment=str(self._pipeline.classes_[best]),
            confidence=round(float(probabilities[best]) * 100, 2),
        )
