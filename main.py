import inquirer
from colorama import Fore
from inquirer import themes
from loguru import logger
from rich.console import Console
from rich.table import Table

from data.constants import PROJECT_NAME
from functions.activity import activity
from libs.cardano_asset.asset import Asset, parse_asset_id
from libs.cardano_asset.constants import FINGERPRINT_HRP
from libs.cardano_asset.exceptions import CardanoAssetError
from libs.cardano_asset.utils import bech32 as b32
from utils.create_files import create_files, reset_folder
from utils.logger import configure

console = Console()


PROJECT_ACTIONS = [
    "1. Fingerprint from policy ID and asset name",
    "2. Fingerprint from asset ID",
    "3. Fingerprint file of asset IDs",
    "4. Decode fingerprint",
    "Back",
]

UTILS_ACTIONS = ["1. Reset files Folder", "Back"]


def show_asset(asset: Asset) -> None:
    info = asset.info()
    table = Table(show_header=False)
    table.add_row("Policy ID", info.policy_id)
    table.add_row("Asset name", asset.display_name())
    table.add_row("Asset name hex", info.asset_name_hex)
    table.add_row("Asset ID", info.asset_id)
    table.add_row("UTF-8 name", str(asset.is_valid_utf8_name()))
    table.add_row("Fingerprint", f"[bold green]{info.fingerprint}[/bold green]")
    console.print(table)


def ask(message: str) -> str:
    answer = inquirer.prompt([inquirer.Text("value", message=Fore.LIGHTBLACK_EX + message)], theme=themes.Default())
    return (answer or {}).get("value", "").strip()


def run_action(action: str) -> None:
    if action == "1. Fingerprint from policy ID and asset name":
        policy_id = ask("Policy ID (56 hex chars)")
        asset_name = ask("Asset name")
        show_asset(Asset.from_name(policy_id, asset_name))

    elif action == "2. Fingerprint from asset ID":
        show_asset(parse_asset_id(ask("Asset ID (policyId.assetNameHex)")))

    elif action == "3. Fingerprint file of asset IDs":
        console.print("[bold blue]Starting fingerprint of asset IDs file[/bold blue]")
        path = activity()
        if path:
            console.print(f"Fingerprints exported to {path}")

    elif action == "4. Decode fingerprint":
        digest = b32.decode(ask("Fingerprint (asset1...)"), FINGERPRINT_HRP)
        console.print(f"Checksum OK | digest: [bold]{digest.hex()}[/bold]")

    elif action == "1. Reset files Folder":
        console.print("This action will delete the files folder and reset it.")
        answer = input("Are you sure you want to perform this action? y/N ")
        if answer.lower() == "y":
            reset_folder()
            console.print("Files folder success reset")


def choose_action() -> None:
    while True:
        cat_question = [
            inquirer.List(
                "category",
                message=Fore.LIGHTBLACK_EX + "Choose action",
                choices=[PROJECT_NAME, "Utils", "Exit"],
            )
        ]

        answers = inquirer.prompt(cat_question, theme=themes.Default()) or {}
        category = answers.get("category", "Exit")

        if category == "Exit":
            console.print(f"[bold red]Exiting {PROJECT_NAME}...[/bold red]")
            raise SystemExit(0)

        actions = PROJECT_ACTIONS if category == PROJECT_NAME else UTILS_ACTIONS

        act_question = [
            inquirer.List(
                "action",
                message=Fore.LIGHTBLACK_EX + f"Choose action in '{category}'",
                choices=actions,
            )
        ]

        act_answer = inquirer.prompt(act_question, theme=themes.Default()) or {}
        action = act_answer.get("action", "Back")

        try:
            run_action(action)
        except CardanoAssetError as e:
            logger.debug(f"{action} failed: {e}")
            console.print(f"[bold red]{e}[/bold red]")


def main():
    create_files()
    configure()
    choose_action()


if __name__ == "__main__":
    main()
