from stockroom.logger import setup_logger
from stockroom.menu import StockManagementSystem


def main():
    """Starts one interactive stock management session on the terminal."""
    logger = setup_logger()
    logger.info("--- Starting Stock Management System ---")

    system = StockManagementSystem()
    system.run()

    logger.info("--- Stock Management System Closed ---")


if __name__ == "__main__":
    main()
