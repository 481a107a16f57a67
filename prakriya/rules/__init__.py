"""
Rule modules.

Each module groups the rules of one section (prakarana) of the grammar
as plain functions over a ``Prakriya``. The driver in
``prakriya.ashtadhyayi`` calls them in a fixed order; no module calls
another's ``run`` except ``it_samjna``, which every upadesha needs.
"""
