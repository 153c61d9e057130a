"""
Type definitions for schemas module

This module contains the enum types and constants shared across the pipeline.
"""

from enum import Enum


# Histogram key for children without a label (SENTINEL policy only)
UNLABELED = "#unlabeled"


class UnlabeledPolicy(str, Enum):
    """How the histogram builder treats children that carry no label"""
    
    EXCLUDE = "exclude"      # Unlabeled children are not counted
    SENTINEL = "sentinel"    # Unlabeled children are counted under UNLABELED
