"""Utility script to reset the demo data for local environments."""

from swissvault.cli import APP


def main() -> None:
	"""Wipe the users, accounts and transactions tables and load the demo fixtures."""
	APP()


if __name__ == "__main__":
	main()
