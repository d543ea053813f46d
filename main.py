"""MedLens - development server entry point."""

from medlens.main import app, run

__all__ = ["app"]


if __name__ == "__main__":
    run()
