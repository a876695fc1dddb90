"""Run the customer-records command line tool with `python -m customer_records`."""

from customer_records.tool.customer_records import main

if __name__ == "__main__":
    main()
