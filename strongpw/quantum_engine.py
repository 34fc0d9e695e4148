from __future__ import annotations

"""
Quantum engine: builds a circuit, puts qubits in superposition,
measures them in alternating bases, and returns raw bitstrings.

QuantumRandomSource turns those bits into a RandomSource for the generator.
"""
from typing import List
from qiskit import QuantumCircuit
from qiskit_aer import AerSimulator
from qiskit import transpile
from loguru import logger

from .config import GeneratorConfig, DEFAULT_CONFIG
from .errors import ConfigurationError
from .randomness import BitStreamRandomSource, amplify_entropy

# SHA-256 output size; raw input per mixing batch is at least this many bits.
DIGEST_BITS = 256


class QuantumEngine:
    """
    Encapsulates all quantum-circuit-related logic.
    """

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        # Local simulator backend.
        self.backend = AerSimulator()

        if self.config.num_qubits <= 0:
            raise ConfigurationError("num_qubits must be positive.")

        # Safety: ensure requested num_qubits does not exceed backend capability.
        backend_cfg = self.backend.configuration()
        max_qubits = getattr(backend_cfg, "num_qubits", None)

        if max_qubits is not None and self.config.num_qubits > max_qubits:
            raise ConfigurationError(
                f"Configured num_qubits={self.config.num_qubits} exceeds "
                f"backend limit ({max_qubits}). "
                "Lower num_qubits in GeneratorConfig."
            )

        self._circuit: QuantumCircuit | None = None

    def _build_circuit(self) -> QuantumCircuit:
        """
        Prepare N qubits, put them in superposition, then measure
        in alternating bases (Z, X, Z, X, …).
        """
        n = self.config.num_qubits
        qc = QuantumCircuit(n, n)

        # 1) Put all qubits into superposition with H gate.
        for i in range(n):
            qc.h(i)

        # 2) Odd indices get a second H, i.e. they are measured in the X basis.
        for i in range(n):
            if i % 2 == 1:
                qc.h(i)
            qc.measure(i, i)

        return qc

    def get_raw_bits(self) -> List[int]:
        """
        Run the circuit once (single shot) and return one bit per qubit.
        """
        if self._circuit is None:
            self._circuit = transpile(self._build_circuit(), self.backend)

        result = self.backend.run(self._circuit, shots=1).result()
        counts = result.get_counts()

        # counts is a dict like {'0101...': 1}
        bitstring = next(iter(counts.keys()))

        # Qiskit orders bits as [q_(n-1) ... q_0]; reverse so index 0 is first qubit.
        bitstring = bitstring[::-1]

        return [int(b) for b in bitstring]


class QuantumRandomSource(BitStreamRandomSource):
    """
    RandomSource fed by simulated qubit measurements.

    Each refill runs the circuit until at least DIGEST_BITS raw bits are
    collected, then mixes them with `entropy_rounds` of SHA-256.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        engine: QuantumEngine | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.engine = engine or QuantumEngine(self.config)
        super().__init__(self._collect)

    def _collect(self) -> List[int]:
        raw: List[int] = []
        while len(raw) < DIGEST_BITS:
            raw.extend(self.engine.get_raw_bits())
        logger.trace("Collected {} raw quantum bits", len(raw))
        return amplify_entropy(raw, self.config.entropy_rounds)
