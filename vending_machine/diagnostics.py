# vending_machine/diagnostics.py
from collections import Counter
from decimal import Decimal
from typing import Any, Dict, List, Optional
import numpy as np

from .console import VendingConsole
from .models import Alert, MachineState, ShopperAction
from .scorer import calculate_stock_value


class Diagnostics:
    def __init__(self, state: MachineState):
        self.starting_balance = state.balance
        self._last_balance = state.balance

        # Tracking Data
        self.history = []
        self.actions = []
        self.purchases: List[Decimal] = []

        # Metrics
        self.total_deposited = Decimal("0")
        self.units_sold: Counter = Counter()
        self.declines: Counter = Counter()

    def record_step(self, console: VendingConsole, action: ShopperAction, alert: Optional[Alert] = None):
        """Record a single shopper action, read after the console applied it"""
        state = console.machine.state
        delta = state.balance - self._last_balance
        self._last_balance = state.balance

        self.history.append({
            'step': len(self.history) + 1,
            'action': action.action,
            'balance': state.balance,
            'alert': alert.title if alert else None,
        })
        self.actions.append(action)

        if action.action == 'deposit':
            self.total_deposited += delta
        elif action.action == 'purchase':
            if alert is not None:
                self.declines[alert.title] += 1
            elif console.current_selection is not None:
                # Successful vend: the console keeps its selection and quantity
                self.purchases.append(-delta)
                self.units_sold[console.current_selection.value] += console.quantity

    def generate_report(self, state: MachineState) -> Dict[str, Any]:
        """Generate end of session report"""
        spent = [float(p) for p in self.purchases]
        return {
            'steps': len(self.history),
            'starting_balance': float(self.starting_balance),
            'final_balance': float(state.balance),
            'total_deposited': float(self.total_deposited),
            'total_spent': round(float(np.sum(spent)), 2) if spent else 0.0,
            'purchases': len(spent),
            'average_purchase': round(float(np.mean(spent)), 2) if spent else 0.0,
            'units_sold': {k: float(v) for k, v in self.units_sold.items()},
            'declines': dict(self.declines),
            'stock_value': float(calculate_stock_value(state)),
        }
