"""Browser front end for seek-sim.

This package provides a Flask application that runs simulations over
HTTP.  It is an **optional** extra — install with::

    pip install seek-sim[web]

The ``create_app`` factory in ``app.py`` serves three endpoints:

- ``GET /`` — HTML page with the textbook example report.
- ``POST /api/simulate`` — simulate the posted requests, return JSON.
- ``GET /api/random`` — simulate a batch of random requests.
"""
