# tariff_programs package
