# vcschema/cli/config.py
#!/usr/bin/env python3
import json

from vcschema.core.app_context import AppContext


def register(subparsers):
    sp = subparsers.add_parser("config", help="Config utilities")
    sps = sp.add_subparsers(dest="config_cmd")

    # default when user runs: `vcschema config`
    def config_default(args, ctx: AppContext) -> int:
        sp.print_help()
        return 1
    sp.set_defaults(func=config_default)

    showp = sps.add_parser("show", help="Show effective config")
    showp.set_defaults(func=show_config)


def show_config(args, ctx: AppContext) -> int:
    print(json.dumps(ctx.config, indent=ctx.indent))
    return 0
