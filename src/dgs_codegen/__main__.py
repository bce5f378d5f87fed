from dgs_codegen.cli import cli

if __name__ == "__main__":
    cli()
