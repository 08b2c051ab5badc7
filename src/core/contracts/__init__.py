"""
Contract Validation Module

JSON Schema контракты вывода Vortex Matrix.
"""

from .validators import (
    CONTRACT_NAMES,
    VORTEX_MATRIX_CONTRACT,
    VORTEX_RESULT_CONTRACT,
    ContractViolation,
    contract_errors,
    dump_vortex_matrix,
    load_contract_schema,
    validate_vortex_matrix,
    validate_vortex_result,
)

__all__ = [
    # Constants
    "CONTRACT_NAMES",
    "VORTEX_MATRIX_CONTRACT",
    "VORTEX_RESULT_CONTRACT",
    # Exceptions
    "ContractViolation",
    # Functions
    "contract_errors",
    "dump_vortex_matrix",
    "load_contract_schema",
    "validate_vortex_matrix",
    "validate_vortex_result",
]
