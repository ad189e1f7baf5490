"""ADTS/AAC frame parsing for embedded RDS data, and predictive channel tuning."""

__version__ = "0.1.0"