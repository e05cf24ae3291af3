"""handlers.py"""


def deploy(manager, arguments):
    command = arguments.command
    service = command.get_option("service").to_string()
    replicas = command.get_option("replicas").to_int()
    dry_run = command.get_option("dry-run").assigned
    prefix = "[dry-run] " if dry_run else ""
    print(f"{prefix}Deploying {service} with {replicas} replica(s)")


def status(manager, arguments):
    print(f"{len(manager.visible_commands())} commands available")
