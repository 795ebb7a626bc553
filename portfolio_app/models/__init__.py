"""
Database models for the portfolio backend.

Three collections live in one relational store:
- contact_messages: contact-form submissions
- generated_links: project links handed out by the link registry
- analytics: one click event per successful link resolution
"""

from .message import ContactMessage
from .link import GeneratedLink
from .click import ClickEvent

__all__ = ["ContactMessage", "GeneratedLink", "ClickEvent"]
