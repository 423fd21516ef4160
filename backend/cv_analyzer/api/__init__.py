from cv_analyzer.api import cv_routes

__all__ = [
    "cv_routes",
]
