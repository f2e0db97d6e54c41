"""
Registrations app - the registration ledger.

A registration links a participant (by email) to a camp and carries the
payment/confirmation status pair. Registering and cancelling are single
units of work: the ledger row and the camp's participant counter change
in one transaction or not at all.
"""
