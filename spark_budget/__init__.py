"""
Spark Budget - Calendar Engine

Payday and bill date arithmetic for a personal budgeting app: next
paydays, daily budget, bill due dates, overdue and due-soon status, and
rolling recurring bills forward after payment.

DESIGN PRINCIPLES:
1. Every date computation takes an explicit "today"
2. Invalid payday settings fail loudly, never silently default
3. Month arithmetic clamps to month end
4. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Spark Budget Team"
