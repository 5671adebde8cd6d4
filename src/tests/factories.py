from __future__ import annotations

from homepage_tui.datamodels import Post


def make_posts(count: int) -> list[Post]:
    """Posts dated 2024-01-01 onward, returned oldest first."""
    return [
        Post(
            slug=f"post-{i}",
            date=f"2024-01-{i + 1:02d}",
            title=f"Post {i}",
            summary=f"Summary {i}",
            tags=("data",),
        )
        for i in range(count)
    ]
