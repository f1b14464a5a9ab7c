from __future__ import annotations

"""
Quantum engine: builds a circuit, puts qubits in superposition,
measures them in alternating bases, and returns raw bitstrings.

QuantumRandomSource turns those bits into 32-bit words for the sampler.
Every seed also mixes in bytes from os.urandom, so the operating system
CSPRNG always contributes even when the backend is a simulator.
"""
import os
from typing import List

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .config import QuantumSourceConfig, DEFAULT_QUANTUM_CONFIG
from .entropy import amplify_entropy, bits_to_bytes, expand_words, xor_streams
from .errors import RandomSourceUnavailableError
from .logging_config import get_logger

logger = get_logger(__name__)


class QuantumEngine:
    """
    Encapsulates all quantum-circuit-related logic.
    """

    def __init__(self, config: QuantumSourceConfig | None = None) -> None:
        self.config = config or DEFAULT_QUANTUM_CONFIG
        # Local simulator backend.
        self.backend = AerSimulator()

        # Safety: ensure requested num_qubits does not exceed backend capability.
        max_qubits = None
        if hasattr(self.backend, "configuration"):
            backend_cfg = self.backend.configuration()
            max_qubits = getattr(backend_cfg, "n_qubits", None) or getattr(
                backend_cfg, "num_qubits", None
            )

        if max_qubits is not None and self.config.num_qubits > max_qubits:
            raise ValueError(
                f"Configured num_qubits={self.config.num_qubits} exceeds "
                f"backend limit ({max_qubits}). "
                "Lower num_qubits in QuantumSourceConfig."
            )

    def _build_circuit(self) -> QuantumCircuit:
        """
        Prepare N qubits, put them in superposition, then measure
        in alternating bases (Z, X, Z, X, …).
        """
        n = self.config.num_qubits
        qc = QuantumCircuit(n, n)

        for i in range(n):
            qc.h(i)

        # Odd indices get a second H, i.e. they are measured in the X basis.
        for i in range(n):
            if i % 2 == 1:
                qc.h(i)
            qc.measure(i, i)

        return qc

    def get_raw_bits(self) -> list[int]:
        """
        Run the circuit once (single shot) and return the measured bits,
        index 0 being the first qubit.
        """
        qc = self._build_circuit()
        tqc = transpile(qc, self.backend)
        result = self.backend.run(tqc, shots=1).result()
        counts = result.get_counts()

        # counts is a dict like {'0101...': 1}
        bitstring = next(iter(counts.keys()))

        # Qiskit orders bits as [q_(n-1) ... q_0]; reverse so index 0 is first qubit.
        return [int(b) for b in bitstring[::-1]]


class QuantumRandomSource:
    """
    RandomSource backed by QuantumEngine.

    Each words() call:
    - runs `quantum_streams` circuits and XOR-combines their bits,
    - appends fresh os.urandom bytes and amplifies with SHA-256,
    - expands the seed into the requested number of words.
    """

    def __init__(
        self,
        config: QuantumSourceConfig | None = None,
        engine: QuantumEngine | None = None,
    ) -> None:
        self.config = config or DEFAULT_QUANTUM_CONFIG
        self._engine = engine

    def _get_engine(self) -> QuantumEngine:
        if self._engine is None:
            self._engine = QuantumEngine(self.config)
        return self._engine

    def _seed(self) -> bytes:
        engine = self._get_engine()
        streams = [engine.get_raw_bits() for _ in range(max(1, self.config.quantum_streams))]
        q_bytes = bits_to_bytes(xor_streams(streams))
        data = q_bytes + os.urandom(self.config.system_seed_bytes)
        return amplify_entropy(data, max(1, self.config.entropy_rounds))

    def words(self, count: int) -> List[int]:
        if count < 0:
            raise ValueError("count must be >= 0")
        if count == 0:
            return []
        try:
            seed = self._seed()
        except Exception as exc:  # noqa: BLE001 - backend errors vary by qiskit version
            logger.error("random_source_failed", source="quantum", error=repr(exc))
            raise RandomSourceUnavailableError(
                f"Quantum random source failed: {exc}"
            ) from exc
        return expand_words(seed, count)
