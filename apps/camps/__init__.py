"""
Camps app - medical camp catalog.

Organizers create, update and delete camps; anyone can browse them.
Each camp carries a participant counter that is only ever moved by the
registrations app, inside the same transaction as the registration
insert or delete it accounts for.
"""
