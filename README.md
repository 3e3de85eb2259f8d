# sodiumbox

Encrypt and decrypt short text messages with a libsodium *secret box*
(XSalsa20 stream cipher with a Poly1305 authenticator). Keys, nonces and
ciphertexts travel as standard base64 strings, so they fit easily in JSON,
configuration files or database columns.

A secret box gives you:

- confidentiality: the message is encrypted;
- integrity: any change to the ciphertext is detected;
- authenticity: only someone holding the shared key could have produced it.

## Installation

```
pip install sodiumbox
```

The package depends on PyNaCl for the underlying cryptography.

## Usage

```python
import base64

import nacl.utils

from sodiumbox import secretbox

# A secret box key is 32 random bytes, stored as base64.
sb_key_b64 = base64.b64encode(nacl.utils.random(32)).decode()

nonce_b64, ciphertext_b64 = secretbox.crypt('{"hello": "world"}', sb_key_b64)

plaintext = secretbox.decrypt(ciphertext_b64, sb_key_b64, nonce_b64)
assert plaintext == '{"hello": "world"}'
```

`secretbox.crypt(data, sb_key_b64, context=None)` encodes `data` as UTF-8,
draws a fresh random 24-byte nonce for every call and returns a
`(nonce_b64, ciphertext_b64)` pair. Store both; the nonce is not secret but is
needed to decrypt.

`secretbox.decrypt(data_b64, sb_key_b64, nonce_b64, context=None)` returns the
plaintext as a string. An empty `data_b64` decrypts to an empty string without
looking at the key or nonce. Otherwise the data, key and nonce are base64-decoded
in that order, then the nonce length and the key length are checked, and only
then is the box opened.

Base64 input is decoded strictly: characters outside the standard alphabet are
rejected. The module exposes the expected sizes as `secretbox.KEY_BYTES` (32)
and `secretbox.NONCE_BYTES` (24).

The optional `context` argument is a mapping of extra details (a record id, a
field name, ...) that is copied onto any error raised, to make failures easier
to trace.

## Errors

Every failure raises a subclass of `sodiumbox.errors.SodiumError`. Each error
has a `message` string (the class name when none is given) and a `details`
dictionary holding the `context` that was passed in.

| Exception                | Base                   | Raised when                                           |
|--------------------------|------------------------|-------------------------------------------------------|
| `Base64DecodeError`      | `ValidationError`      | data, key or nonce is not valid base64                |
| `InvalidBoxKeyLength`    | `InvalidConfiguration` | the decoded key is not 32 bytes                       |
| `InvalidBoxNonceLength`  | `InvalidConfiguration` | the decoded nonce is not 24 bytes                     |
| `FailedToOpenSecretBox`  | `ValidationError`      | authentication fails (wrong key, nonce or tampering)  |
| `InvalidContent`         | `ValidationError`      | the decrypted bytes are not valid UTF-8               |

`InvalidConfiguration` and `ValidationError` both derive from `SodiumError`.
`sodiumbox.errors` also defines `FailedToOpenSealedBox` (a `ValidationError`),
which nothing in this package raises.

```python
from sodiumbox import secretbox
from sodiumbox.errors import FailedToOpenSecretBox, InvalidConfiguration

try:
    secretbox.decrypt(ciphertext_b64, sb_key_b64, nonce_b64, {"record": 42})
except InvalidConfiguration:
    ...  # key or nonce has the wrong size
except FailedToOpenSecretBox as exc:
    print(exc.message, exc.details)  # "Decryption failed" {'record': 42}
```

## What it does not do

- Only shared-key secret boxes are supported. There is no public-key
  (sealed-box) encryption or decryption.
- It does not generate or store keys; bring your own 32-byte key as base64.
- It is a library only; there is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```