from bluecanary.service.model import Prediction, SentimentModel

__all__ = ["Prediction", "SentimentModel"]
