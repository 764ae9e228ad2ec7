from scorecast.models.aggregation import DeepDiveAnalysis, FavoriteMatch, LeagueOption, MatchListData
from scorecast.models.fixtures import Fixture
from scorecast.models.news import NewsItem
from scorecast.models.odds import Odds, ThreeWayPrices
from scorecast.models.prediction import PredictionInput, PredictionOutput

__all__ = [
    "DeepDiveAnalysis",
    "FavoriteMatch",
    "Fixture",
    "LeagueOption",
    "MatchListData",
    "NewsItem",
    "Odds",
    "PredictionInput",
    "PredictionOutput",
    "ThreeWayPrices",
]
