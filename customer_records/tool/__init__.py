"""Command line tool and interactive shell for customer-records."""
