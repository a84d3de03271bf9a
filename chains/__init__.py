# chains package
