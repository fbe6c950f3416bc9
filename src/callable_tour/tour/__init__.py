"""Console walkthrough sections.

Each module exposes numbered ``demo_*`` functions and a ``run_all(settings)``
that runs them in order. :mod:`callable_tour.__main__` registers the modules
in :data:`SECTIONS` order.
"""

SECTIONS = (
    "named_references",
    "multicast",
    "publisher",
    "anonymous",
    "higher_order",
    "expression_trees",
    "deferred_query",
)
