import argparse
import logging
import time

from vdf_proofs import Scheme
from vdf_proofs.boundary import Boundary
from vdf_proofs.converters import ProofConverter
from vdf_proofs.database.DatabaseService import DatabaseService
from vdf_proofs.database.initialize_db import initialize_database
from vdf_proofs.utils.EnvironmentManager import EnvironmentManager, EnvironmentVariables


def parse_args() -> argparse.Namespace:
    default_bits = EnvironmentManager.get_int(EnvironmentVariables.DEFAULT_BIT_LENGTH)

    parser = argparse.ArgumentParser(description="Generate and verify class group VDF proofs.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser("generate", help="Generate a proof")
    generate_parser.add_argument("challenge", help="Challenge as a hex string")
    generate_parser.add_argument("iterations", type=int, help="Number of sequential squarings")
    generate_parser.add_argument("--bits", type=int, default=default_bits, help="Discriminant bit length")
    generate_parser.add_argument("--pietrzak", action="store_true", help="Use the Pietrzak scheme")
    generate_parser.add_argument("--save", action="store_true", help="Store the proof in the database")

    verify_parser = subparsers.add_parser("verify", help="Verify a proof")
    verify_parser.add_argument("challenge", help="Challenge as a hex string")
    verify_parser.add_argument("iterations", type=int, help="Number of sequential squarings")
    verify_parser.add_argument("proof", help="Proof as a hex string")
    verify_parser.add_argument("--bits", type=int, default=default_bits, help="Discriminant bit length")
    verify_parser.add_argument("--pietrzak", action="store_true", help="Use the Pietrzak scheme")
    verify_parser.add_argument("--slow", action="store_true", help="Repeat the squarings instead of the fast check")

    return parser.parse_args()


def run_generate(args: argparse.Namespace) -> int:
    challenge = bytes.fromhex(args.challenge)

    start_time = time.time()
    status, handle = Boundary.generate(args.iterations, challenge, args.bits, args.pietrzak)
    generation_time = time.time() - start_time
    if status != Boundary.STATUS_OK:
        print("Proof generation failed.")
        return status

    try:
        proof = Boundary.read_proof(handle)
    finally:
        Boundary.release(handle)
    print("Proof:", proof.hex())
    print(f"Proof generation time: {generation_time:.4f} seconds")

    if args.save:
        initialize_database()
        scheme = Scheme.from_flag(args.pietrzak)
        entity = ProofConverter.to_entity(scheme.value, args.iterations, args.bits, challenge, proof)
        DatabaseService.save_many([entity])
        print("Saved proof", entity.id)
    return 0


def run_verify(args: argparse.Namespace) -> int:
    challenge = bytes.fromhex(args.challenge)
    proof = bytes.fromhex(args.proof)
    verify = Boundary.verify_slow if args.slow else Boundary.verify

    start_time = time.time()
    is_valid = verify(args.iterations, challenge, proof, args.bits, args.pietrzak)
    verification_time = time.time() - start_time
    print("Verification:", "Valid" if is_valid else "Invalid")
    print(f"Verification time: {verification_time:.4f} seconds")
    return 0 if is_valid else 1


def main() -> int:
    """
    Runs the VDF command line tool.

    Generates a proof for a hex challenge and prints it, optionally storing it in the database,
    or checks a proof with the fast or the slow verifier.
    """
    logging.basicConfig(level=EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL).upper())
    args = parse_args()
    if args.command == "generate":
        return run_generate(args)
    return run_verify(args)


if __name__ == "__main__":
    raise SystemExit(main())
