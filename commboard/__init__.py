"""
CommBoard - Community bulletin board

Announcements, events, a marketplace and a contact list for a local
community, persisted to a small key/value store with demo logins.
"""

__version__ = "0.1.0"
__author__ = "CommBoard Project"
