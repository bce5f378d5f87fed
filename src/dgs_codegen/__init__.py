from dgs_codegen.logger import get_logger

__author__ = """Aupma Codegen Developers"""
__version__ = "0.2.3"

log = get_logger("dgs_codegen")
