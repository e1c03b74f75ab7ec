from .tier_charts import plot_game_lengths, plot_head_to_head, plot_ranking

__all__ = ["plot_game_lengths", "plot_head_to_head", "plot_ranking"]
