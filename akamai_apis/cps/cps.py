"""
Certificate Provisioning System (CPS) client.

See: https://techdocs.akamai.com/cps/reference/api
"""

from .change_operations import ChangeOperations
from .enrollments import Enrollments


class CPS(ChangeOperations, Enrollments):
    """CPS API: enrollments and their pending changes."""
