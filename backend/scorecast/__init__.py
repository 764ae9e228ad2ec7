"""ScoreCast: football fixtures, odds and news aggregation with AI match predictions."""
