"""SmartCart notification service package.

Holds the routing, dispatch and retention logic that turns document change
events into push notifications.
"""
