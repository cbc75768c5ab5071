"""Routing — ordered route table with first-match-wins dispatch.

Templates compile to anchored patterns at registration time; dispatch
scans the request method's entries in registration order.
"""
