"""
Budget Planner backend.
"""
