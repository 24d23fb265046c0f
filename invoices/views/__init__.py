from .main_views import custom_404_view, custom_500_view

__all__ = ["custom_404_view", "custom_500_view"]
