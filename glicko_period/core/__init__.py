"""the Glicko 2 computation: per player update, volatility root-finder and rating period orchestration"""
