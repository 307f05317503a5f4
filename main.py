# main.py
import sys
import json
from typing import Any, Dict, List, Optional
from vending_machine.console import VendingConsole
from vending_machine.diagnostics import Diagnostics
from vending_machine.engine import VendingMachine
from vending_machine.loader import load_inventory
from vending_machine.models import ShopperAction
from colorama import Fore, Style, init

init(autoreset=True)

# A short walk through the machine: a sale, a failed sale, a top-up and a retry
DEMO_SESSION = [
    {'action': 'select', 'index': 0},
    {'action': 'quantity', 'quantity': 2},
    {'action': 'purchase'},
    {'action': 'select', 'index': 4},
    {'action': 'quantity', 'quantity': 3},
    {'action': 'purchase'},
    {'action': 'deposit'},
    {'action': 'deposit'},
    {'action': 'select', 'index': 5},
    {'action': 'purchase'},
]


def build_machine() -> VendingMachine:
    """
    Loads the bundled inventory and builds the one machine for this process.
    Inventory errors are not caught: a machine without stock cannot start.
    """
    return VendingMachine(load_inventory())


def apply_action(console: VendingConsole, action: ShopperAction):
    if action.action == 'select':
        console.select(action.index)
    elif action.action == 'quantity':
        console.update_quantity(action.quantity)
    elif action.action == 'deposit':
        console.deposit_funds()
    elif action.action == 'purchase':
        return console.purchase()
    return None


def run_session(script: List[Dict[str, Any]],
                machine: Optional[VendingMachine] = None,
                verbose: bool = False) -> Dict[str, Any]:
    machine = machine or build_machine()
    console = VendingConsole(machine)
    diagnostics = Diagnostics(machine.state)

    if verbose:
        print(f"{Fore.CYAN}Vending machine ready. Balance ${machine.balance}{Style.RESET_ALL}")
        for selection, icon in console.tiles():
            item = machine.item_for(selection)
            stock = item.quantity if item else '-'
            print(f"  [{selection.value:<12}] icon={icon:<12} stock={stock}")

    for step in script:
        action = ShopperAction.model_validate(step)
        seen = len(machine.state.log_history)

        alert = apply_action(console, action)
        diagnostics.record_step(console, action, alert)

        if verbose:
            if action.action == 'select':
                print(f"{Fore.YELLOW}Selected {console.current_selection.value} "
                      f"(total ${console.total_price()}){Style.RESET_ALL}")
            for log in machine.state.log_history[seen:]:
                if log.startswith("DECLINED"):
                    print(f"{Fore.LIGHTBLACK_EX}{log}{Style.RESET_ALL}")
                else:
                    print(log)
            if alert:
                print(f"{Fore.RED}ALERT: {alert.title}{Style.RESET_ALL}")
                if alert.message:
                    print(f"{Fore.RED}  {alert.message}{Style.RESET_ALL}")

    report = diagnostics.generate_report(machine.state)

    if verbose:
        print(f"\n{Fore.GREEN}Session Complete.{Style.RESET_ALL}")
        print("\n=== SESSION REPORT ===")
        print(f"Purchases: {report['purchases']} (${report['total_spent']:.2f})")
        print(f"Declined: {report['declines']}")
        print(f"Deposited: ${report['total_deposited']:.2f}")
        print(f"Final Balance: ${report['final_balance']:.2f}")
        print(f"Stock Value: ${report['stock_value']:.2f}")
        print("======================")

    return report


if __name__ == "__main__":
    # Optional path to a JSON list of shopper actions, otherwise the demo session
    if len(sys.argv) > 1:
        with open(sys.argv[1], 'r') as f:
            session = json.load(f)
    else:
        session = DEMO_SESSION
    run_session(session, verbose=True)
