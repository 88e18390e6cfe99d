"""Cryptographic constants for Kyber Transit."""

# ML-KEM ring modulus
MLKEM_Q = 3329

# Bytes per encoded polynomial (256 coefficients, 12 bits each)
MLKEM_POLY_BYTES = 384

# Seed rho, H(ek) and z are all 32 bytes
MLKEM_SYM_BYTES = 32

# ML-KEM shared secret size, identical across parameter sets
MLKEM_SHARED_SECRET_SIZE = 32

# ML-KEM-512 (k=2)
MLKEM512_PUBLIC_KEY_SIZE = 800
MLKEM512_SECRET_KEY_SIZE = 1632
MLKEM512_CIPHERTEXT_SIZE = 768

# ML-KEM-768 (k=3)
MLKEM768_PUBLIC_KEY_SIZE = 1184
MLKEM768_SECRET_KEY_SIZE = 2400
MLKEM768_CIPHERTEXT_SIZE = 1088

# ML-KEM-1024 (k=4), the Kyber-1024 parameter set
MLKEM1024_PUBLIC_KEY_SIZE = 1568
MLKEM1024_SECRET_KEY_SIZE = 3168
MLKEM1024_CIPHERTEXT_SIZE = 1568
