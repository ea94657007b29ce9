from .race_pie_view import RacePieView
from .age_bar_view import AgeBarView
from .heat_map_view import AgeRaceHeatmapView

__all__ = ["RacePieView", "AgeBarView", "AgeRaceHeatmapView"]
