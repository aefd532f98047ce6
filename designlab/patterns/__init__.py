"""Design patterns: logger, adapter, factories, observer, chain and composite."""