"""Personal net worth tracker."""
