"""
TinyML Eval: on-device evaluation harness for a pre-trained classifier.

Feeds a fixed labeled dataset through a classification model one sample at a
time, tallies outcomes into a confusion matrix and renders the matrix on a
small bitmap display. Modular layout: dataset tables, inference adapters,
evaluation core, renderer and trigger input.
"""

__version__ = "0.1.0"
