"""Pontaj package.

Timekeeping for a small manufacturing company. Organized by feature modules
(employees, timesheet, holidays, reports, ...) with a thin Flask controller
layer over service/repository layers. The collective report engine lives in
``reports`` and has no dependency on Flask or MySQL.
"""
