import radixcodec
import logging
import sys
import argparse


def run():

    parser = argparse.ArgumentParser(description="Encode text with radixcodec")
    parser.add_argument("text", nargs="?", default="Hello World!")
    parser.add_argument("--debug", action="store_true", help="Enable log debugger")
    args = parser.parse_args()

    log = logging.getLogger("radixcodec")
    log.setLevel(logging.DEBUG)

    if args.debug:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        log.addHandler(console_handler)

    codec = radixcodec.Base58Codec(log=log)

    data = radixcodec.utf8.encode(args.text)
    b58 = codec.encode(data)
    b16 = radixcodec.encode_base16(data)

    print(f"utf-8:   {list(data)}")
    print(f"base58:  {b58}")
    print(f"base16:  {b16}")
    print(f"hex->58: {codec.from_hex(b16)}")
    print(f"base64:  {radixcodec.base64.encode(data)}")
    print(f"url:     {radixcodec.url.encode(args.text)}")

    assert codec.to_text(b58) == args.text


if __name__ == "__main__":
    run()
