"""Retrieve database grasps for recognized objects and map them onto a robot hand."""
