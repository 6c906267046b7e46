from .client import ContractReader, Web3ContractReader, call_function

__all__ = ["ContractReader", "Web3ContractReader", "call_function"]
