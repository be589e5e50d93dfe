"""Progress display for reports that walk many projects."""

import sys

from tqdm import tqdm


class ProgressTracker:
    """Wraps iterations in a tqdm progress bar."""

    def __init__(self, enabled=True):
        """Initialize the progress tracker.

        Args:
            enabled (bool): Show progress bars
        """
        self.enabled = enabled
        self.current_bar = None

    def track(self, items, description, unit='items'):
        """Yield ``items`` while advancing a progress bar.

        Args:
            items (list): Items to iterate
            description (str): Description of the operation
            unit (str): Unit name for items
        """
        self.current_bar = tqdm(
            total=len(items),
            desc=description,
            unit=unit,
            ncols=100,
            file=sys.stdout,
            disable=not self.enabled
        )
        try:
            for item in items:
                yield item
                self.current_bar.update(1)
        finally:
            self.current_bar.close()
            self.current_bar = None

    def set_postfix(self, **kwargs):
        """Set postfix values for the current bar."""
        if self.current_bar:
            self.current_bar.set_postfix(**kwargs)
