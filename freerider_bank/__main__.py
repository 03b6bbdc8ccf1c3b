"""Run the gateway with uvicorn: python -m freerider_bank"""

import uvicorn


def main() -> None:
    uvicorn.run("freerider_bank.api.main:app", host="0.0.0.0", port=8000, log_config=None)


if __name__ == "__main__":
    main()
